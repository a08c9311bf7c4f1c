from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Mapping, Optional

from flask import flash, g, redirect, render_template, session, url_for

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .identity import Identity

SESSION_ROLE = "role"
SESSION_NAME = "name"


@dataclass(frozen=True)
class RequestContext:
    """Role and display name of the caller, passed explicitly into every service call."""

    role: Role
    display_name: str

    def require(self, *roles: Role) -> None:
        if self.role not in roles:
            raise AuthorizationError("You do not have permission to perform this action")

    @classmethod
    def from_session(cls, data: Mapping) -> Optional["RequestContext"]:
        try:
            role = Role(data.get(SESSION_ROLE))
        except ValueError:
            return None
        return cls(role=role, display_name=str(data.get(SESSION_NAME) or role.value))


def start_session(identity: Identity) -> None:
    session.clear()
    session[SESSION_ROLE] = identity.role.value
    session[SESSION_NAME] = identity.display_name


def current_context() -> Optional[RequestContext]:
    return RequestContext.from_session(session)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = current_context()
        if ctx is None:
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login"))
        g.ctx = ctx
        return view(*args, **kwargs)

    return wrapper


def role_required(*roles: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            ctx = current_context()
            if ctx is None:
                flash("Please log in to continue.", "warning")
                return redirect(url_for("login"))
            if ctx.role not in roles:
                return render_template("403.html", current_user=ctx), 403
            g.ctx = ctx
            return view(*args, **kwargs)

        return wrapper

    return decorator
