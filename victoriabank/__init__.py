"""Victoriabank e-Commerce Gateway P_SIGN signatures.

Entry points: ``victoriabank.payments.PSignService`` for signing requests and
verifying responses, ``victoriabank.core.logging.setup_logging`` for log
output. Configuration is read from ``VB_*`` environment variables only when
``PSignService.from_settings()`` or ``setup_logging()`` asks for it.
"""

__version__ = "1.0.0"
