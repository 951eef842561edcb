"""PromoCode Factory - employee and role administration service.

An HTTP API over in-memory employee and role stores that refuses to
delete roles still assigned to employees.
"""

__version__ = "0.1.0"
