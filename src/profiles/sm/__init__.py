"""Short-message language profiles.

Profile files are named after their language code (``en``, ``zh-cn``, ...)
and installed into this package next to this module; see ``SM_LANGUAGES`` in
``src.profiles.config`` for the expected set.
"""
