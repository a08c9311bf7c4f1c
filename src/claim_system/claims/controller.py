from __future__ import annotations

from flask import Flask, abort, flash, g, redirect, render_template, request, send_file, url_for
from werkzeug.exceptions import HTTPException

from ..auth.context import login_required, role_required
from ..container import Container
from ..core.enums import ClaimStatus, Role
from ..core.exceptions import AuthorizationError, ClaimAlreadyDecidedError, NotFoundError, ValidationError
from .model import NewClaim


def register(app: Flask, container: Container) -> None:
    claim_service = container.claim_service

    def _claim_form() -> NewClaim:
        return NewClaim(
            lecturer_name=request.form.get("lecturer_name", ""),
            lecturer_email=request.form.get("lecturer_email", ""),
            hours_worked=request.form.get("hours_worked", ""),
            hourly_rate=request.form.get("hourly_rate", ""),
            notes=request.form.get("notes", ""),
        )

    @app.route("/claims/submit", methods=["GET", "POST"], endpoint="submit_claim")
    @role_required(Role.LECTURER)
    def submit_claim():
        errors: dict = {}
        if request.method == "POST":
            try:
                claim_id = claim_service.submit(g.ctx, _claim_form(), request.files.get("supporting_document"))
                flash(f"Claim #{claim_id} submitted successfully!", "success")
                return redirect(url_for("submit_claim"))
            except ValidationError as e:
                errors = e.errors
                flash(str(e), "danger")
            except AuthorizationError as e:
                flash(str(e), "danger")
            except HTTPException:
                # oversized uploads surface here as 413 and go to the app handler
                raise
            except Exception:
                app.logger.exception("Claim submission failed")
                flash("System error while submitting the claim. Please try again.", "danger")

        return render_template(
            "claims/submit.html",
            form=request.form,
            errors=errors,
            allowed_extensions=container.documents.allowed_extensions,
            active_page="submit_claim",
        )

    @app.route("/claims/history", methods=["GET"], endpoint="claim_history")
    @login_required
    def claim_history():
        email = request.args.get("email", "")
        history = claim_service.history(g.ctx, lecturer_email=email)
        return render_template("claims/history.html", history=history, email=email, active_page="claim_history")

    @app.route("/claims/track", methods=["GET"], endpoint="track_claims")
    @login_required
    def track_claims():
        claim_id = request.args.get("claim_id", type=int)
        if claim_id is not None:
            return redirect(url_for("track_claim", claim_id=claim_id))

        email = request.args.get("email", "")
        claims = claim_service.track_all(g.ctx, lecturer_email=email)
        return render_template("claims/track.html", claims=claims, claim=None, email=email, active_page="track_claims")

    @app.route("/claims/track/<int:claim_id>", methods=["GET"], endpoint="track_claim")
    @login_required
    def track_claim(claim_id: int):
        try:
            claim = claim_service.track(g.ctx, claim_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return render_template("claims/track.html", claims=[], claim=None, email="", active_page="track_claims"), 404
        return render_template("claims/track.html", claims=[], claim=claim, email="", active_page="track_claims")

    @app.route("/claims/<int:claim_id>/document", methods=["GET"], endpoint="claim_document")
    @login_required
    def claim_document(claim_id: int):
        try:
            path = claim_service.document_path(g.ctx, claim_id)
        except NotFoundError:
            abort(404)
        return send_file(path, as_attachment=True, download_name=path.name.split("_", 1)[-1])

    @app.route("/claims/manage", methods=["GET"], endpoint="manage_claims")
    @role_required(Role.COORDINATOR)
    def manage_claims():
        raw = request.args.get("status", ClaimStatus.PENDING.value)
        try:
            status = None if raw == "all" else ClaimStatus(raw)
        except ValueError:
            status = ClaimStatus.PENDING
        claims = claim_service.review_queue(g.ctx, status=status)
        return render_template(
            "claims/manage.html",
            claims=claims,
            status=status,
            statuses=list(ClaimStatus),
            active_page="manage_claims",
        )

    def _decide(claim_id: int, action, done_message: str, category: str):
        try:
            action(g.ctx, claim_id)
            flash(done_message.format(claim_id=claim_id), category)
        except (NotFoundError, ClaimAlreadyDecidedError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Decision on claim %s failed", claim_id)
            flash("System error while updating the claim", "danger")
        return redirect(url_for("manage_claims"))

    @app.route("/claims/<int:claim_id>/approve", methods=["POST"], endpoint="approve_claim")
    @role_required(Role.COORDINATOR)
    def approve_claim(claim_id: int):
        return _decide(claim_id, claim_service.approve, "Claim #{claim_id} approved", "success")

    @app.route("/claims/<int:claim_id>/reject", methods=["POST"], endpoint="reject_claim")
    @role_required(Role.COORDINATOR)
    def reject_claim(claim_id: int):
        return _decide(claim_id, claim_service.reject, "Claim #{claim_id} rejected", "info")
