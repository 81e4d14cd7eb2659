from cronparse.cli import main

main()
