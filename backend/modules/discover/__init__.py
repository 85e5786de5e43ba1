"""
Discover module.

HTTP surface of the discovery feed engine. The business logic lives in
the quota, exclusions and candidates modules; this module only wires
them to routes.
"""
