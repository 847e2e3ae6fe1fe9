"""Pydantic schemas for the admin session endpoints."""
from pydantic import BaseModel


class AdminLogin(BaseModel):
    password: str
