from src.cql_examples.cli import main

main()
