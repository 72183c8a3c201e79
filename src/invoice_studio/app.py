import logging

from invoice_studio.core import config
from invoice_studio.core.services.settings import load_settings
from invoice_studio.ui.layouts.main_window import MainWindow


def main() -> None:
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    business, settings = load_settings()
    app = MainWindow(business, settings)
    app.mainloop()


if __name__ == "__main__":
    main()
