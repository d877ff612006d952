from rpsgame.main import main

raise SystemExit(main())
