from dirserve.cli_serve import main

raise SystemExit(main())
