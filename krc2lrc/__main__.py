from krc2lrc.cli import main

main()
