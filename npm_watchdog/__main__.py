from npm_watchdog.cli import main

main()
