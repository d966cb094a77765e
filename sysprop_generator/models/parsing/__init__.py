"""Decoding sysprop files into :class:`~sysprop_generator.models.sysprop.PropertySet`."""
