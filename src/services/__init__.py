"""Business logic services for the coordinator and sales representatives.

Import services from their modules directly; this package does not re-export
them so that models can be used without pulling in the service layer.
"""
