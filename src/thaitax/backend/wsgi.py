"""WSGI entrypoint for deploying the ThaiTax backend behind a WSGI server."""

from thaitax.backend.app import create_app

# WSGI servers look for a module-level variable named ``application``.
application = create_app()
