from __future__ import annotations

from albums.main import run

if __name__ == "__main__":
    run()
