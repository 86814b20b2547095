from set_resolver.cli.main import main

raise SystemExit(main())
