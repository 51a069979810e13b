"""Built-in transports.

Each module registers its transport when imported; the loader imports
``conduit.transports.<backend>`` on first use.
"""
