"""Type-specialized validator libraries.

Each module fixes the field's value type and offers ready-made
validators built on :func:`formfield.domain.validators.create_validator`.
The error value is always the last argument.
"""
