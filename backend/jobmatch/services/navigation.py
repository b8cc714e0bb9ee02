"""
Navigation shell: links shown for the current session
"""
from typing import Dict, List

from jobmatch.services.session_context import SessionContext


NAV_ITEMS = [
    {"name": "Home", "href": "/", "auth": False},
    {"name": "Jobs", "href": "/jobs", "auth": True},
    {"name": "Companies", "href": "/companies", "auth": False},
    {"name": "Discussions", "href": "/discussions", "auth": False},
]

ACCOUNT_ITEMS = [
    {"name": "My Profile", "href": "/profile"},
    {"name": "Applications", "href": "/applications"},
    {"name": "Messages", "href": "/messages"},
]

COMPANY_DASHBOARD_ITEM = {"name": "Company Dashboard", "href": "/company/dashboard"}

SIGNED_OUT_ITEMS = [
    {"name": "Log in", "href": "/auth/login"},
    {"name": "Sign up", "href": "/auth/register"},
]


def build_navigation(ctx: SessionContext) -> Dict:
    signed_in = ctx.is_authenticated
    items: List[Dict[str, str]] = [
        {"name": item["name"], "href": item["href"]}
        for item in NAV_ITEMS
        if not item["auth"] or signed_in
    ]

    if not signed_in:
        return {"items": items, "account_items": list(SIGNED_OUT_ITEMS), "signed_in": False}

    account_items = list(ACCOUNT_ITEMS)
    if ctx.is_company_admin:
        account_items.append(COMPANY_DASHBOARD_ITEM)

    return {
        "items": items,
        "account_items": account_items,
        "signed_in": True,
        "email": ctx.user.email,
        "display_name": ctx.profile.full_name if ctx.profile else None,
    }
