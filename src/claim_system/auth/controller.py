from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError
from .context import current_context, start_session


def register(app: Flask, container: Container) -> None:
    auth_service = container.auth_service

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        ctx = current_context()
        if ctx is not None:
            return redirect(url_for(auth_service.landing_endpoint(ctx.role)))

        error = None
        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            try:
                identity = auth_service.login(username, password)
                start_session(identity)
                session.permanent = True

                flash(f"Welcome, {identity.role.value}!", "success")
                return redirect(url_for(auth_service.landing_endpoint(identity.role)))
            except AuthenticationError as e:
                error = str(e)
            except Exception:
                app.logger.exception("Login failed unexpectedly")
                error = "System error while logging in."

        return render_template("auth/login.html", error=error, username=request.form.get("username", ""))

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been logged out successfully.", "info")
        return redirect(url_for("login"))
