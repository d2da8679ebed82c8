"""Prefix user-defined type names in GraphQL SDL documents."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
