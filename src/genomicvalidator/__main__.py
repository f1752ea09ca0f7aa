from genomicvalidator.cli import main

main()
