"""
Pydantic request schemas.

Each request schema groups the parts of an HTTP request it constrains into
``params`` (path arguments), ``body`` and ``query`` sections.  They are
applied by :func:`booking_portal.utils.validation.validate_request`.
"""
