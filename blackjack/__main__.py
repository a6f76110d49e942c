from blackjack.cli import main

raise SystemExit(main())
