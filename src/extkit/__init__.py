"""extkit - Extension configuration and environment safety for agents.

extkit describes the tool providers ("extensions") an agent can call and
guards the environment variables handed to them when they are launched.

Key modules:

- :mod:`extkit.extensions.config` - Extension variants, builders and wire format
- :mod:`extkit.extensions.env` - Environment variable denylist and validated env maps
- :mod:`extkit.extensions.errors` - Extension error taxonomy
- :mod:`extkit.extensions.activation` - Environment resolution before launch
- :mod:`extkit.extensions.registry` - Key-indexed extension registry
- :mod:`extkit.config` - YAML configuration loading and saving
"""

__version__ = "0.1.0"
