from rsjj.cli import main

raise SystemExit(main())
