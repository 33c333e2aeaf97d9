from chessedit.app import main

raise SystemExit(main())
