# tracker/__main__.py
from .main import main

raise SystemExit(main())
