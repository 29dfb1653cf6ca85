"""Built-in audits. Importing this package registers them."""

from . import first_meaningful_paint  # noqa: F401
