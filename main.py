import logging

import arcade

from blockdrop.core.config import load_settings
from blockdrop.view.gui import PlayfieldView


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    window = arcade.Window(settings.window_width, settings.window_height, "Blockdrop")
    window.show_view(PlayfieldView(settings))
    arcade.run()


if __name__ == "__main__":
    main()
