#!/usr/bin/env python3
from fontawesome_gtk.app import main


if __name__ == "__main__":
    raise SystemExit(main())
