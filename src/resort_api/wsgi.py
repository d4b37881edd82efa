"""
WSGI entry point: ``gunicorn resort_api.wsgi:app``.
"""

from resort_api.app import create_app

app = create_app()


if __name__ == "__main__":
    from resort_api.extensions import CONFIG_KEY

    config = app.extensions[CONFIG_KEY]
    app.run(host="0.0.0.0", port=config.port, debug=config.debug_mode)
