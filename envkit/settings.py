#!/usr/bin/env python3
"""
Process-wide envkit instance.

Importing this module loads ``.env.<environment>`` from the current working
directory into os.environ (existing variables win) and exposes a shared
accessor::

    from envkit.settings import env

    port = env.get_number("PORT", 8000)

The settings file path is always announced as an INFO record on the
``envkit.config.store`` logger. Python only prints WARNING and above when
no handler is configured, so the announcement is visible only after logging
is set up: either set ``logging.configure: true`` in ``envkit.yaml``, or
configure logging (e.g. with :func:`envkit.utils.logger.setup_logging`)
before importing this module. Load failures are ERROR records and are
printed either way.
"""

from .config.accessor import EnvironmentVariables
from .config.options import load_options
from .config.store import EnvStore, bootstrap
from .utils.logger import setup_logging

options = load_options()

if options.configure_logging:
    setup_logging(options)

store = EnvStore()
load_result = bootstrap(store, options=options)

env = EnvironmentVariables(store=store, options=options)

__all__ = ["env", "store", "options", "load_result"]
