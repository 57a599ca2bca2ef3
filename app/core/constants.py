"""Storefront-wide constants."""

WHATSAPP_NUMBER = "212620198762"
WHATSAPP_HOST = "wa.me"

# Characters left unescaped by JavaScript's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"

DEFAULT_SIZES = ("S", "M", "L", "XL")
PLACEHOLDER_IMAGE = "/placeholder.svg"
