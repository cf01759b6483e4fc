"""Pydantic request/response contracts, one module per API area."""
