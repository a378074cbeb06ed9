# topmark:header:start
#
#   project      : HydraTag
#   file         : __init__.py
#   file_relpath : src/hydratag/integrations/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host template engine integrations."""
