"""Palette Studio development server.

Usage
-----
$ pip install -e .
$ python main.py                # starts on http://127.0.0.1:5000

Routes: /variants (tints & shades), /convert, /contrast, /palettes,
/palettes/export. Settings come from PALETTE_STUDIO_* environment
variables, e.g. PALETTE_STUDIO_GENERATION_DELAY=0.
"""

from palette_studio.app import create_app

if __name__ == "__main__":
    create_app().run(debug=True, threaded=True)
