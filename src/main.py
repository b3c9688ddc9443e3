"""Entry point for the mythoji glyph gallery.

Opens an Arcade window that pages through every glyph family.
"""
from mythoji.gallery.window import main

if __name__ == "__main__":
    main()
