"""Pydantic request and response contracts, one module per resource."""
