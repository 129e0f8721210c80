from glyphfix.cli import main

main()
