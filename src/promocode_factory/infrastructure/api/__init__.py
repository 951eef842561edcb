"""HTTP API for PromoCode Factory."""
