from mdedit.main import main

raise SystemExit(main())
