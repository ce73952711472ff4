from rps.cli import main


raise SystemExit(main())
