"""
Storage-facing repositories used by the service layer.
"""
