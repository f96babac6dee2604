"""Project root entry point for launching the JSON API."""

from __future__ import annotations


def main():
    from i18n_layout.config import load_config
    from i18n_layout.web import create_app

    app = create_app()
    web_config = load_config()["web"]
    app.run(host=web_config["host"], port=web_config["port"], debug=web_config["debug"])


if __name__ == "__main__":
    main()
