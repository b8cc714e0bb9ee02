"""
Navigation Schemas
"""
from pydantic import BaseModel
from typing import List, Optional


class NavItem(BaseModel):
    name: str
    href: str


class NavigationResponse(BaseModel):
    items: List[NavItem]
    account_items: List[NavItem]
    signed_in: bool
    email: Optional[str] = None
    display_name: Optional[str] = None
