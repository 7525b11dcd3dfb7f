from __future__ import annotations

from typing import Optional

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.datetime_utils import today_local
from ..core.constants import RATE_STORAGE_KEY
from ..container import Container
from .controller import HoursController
from .renderer import render_dashboard
from .state import EntriesState


class FlashNotifier:
    def notify(self, message: str, level: str) -> None:
        flash(message, level)


class SessionRateStore:
    """Keeps the hourly rate in the browser's session cookie, not in the DB."""

    def load(self) -> Optional[float]:
        value = session.get(RATE_STORAGE_KEY)
        return float(value) if value is not None else None

    def save(self, rate: float) -> None:
        session[RATE_STORAGE_KEY] = rate


class FormConfirmation:
    """Confirmed once the user submitted the confirmation page."""

    def __init__(self, form):
        self._confirmed = form.get("confirmed") == "1"

    def confirm(self, message: str) -> bool:
        return self._confirmed


def register(app: Flask, container: Container) -> None:
    def _controller() -> HoursController:
        return HoursController(
            container.api_client,
            EntriesState(),
            FlashNotifier(),
            SessionRateStore(),
            default_rate=container.default_hourly_rate,
        )

    @app.route("/", methods=["GET"], endpoint="dashboard")
    def dashboard():
        controller = _controller()
        state = controller.refresh()

        today = today_local()
        selected = controller.select_date(request.args.get("date"))
        view = render_dashboard(
            state,
            calculator=container.summary_calculator,
            today=today,
            rate=controller.current_rate(),
            form_date=selected,
            form_hours=request.args.get("hours", ""),
            focus_hours=selected is not None,
        )
        return render_template("dashboard.html", view=view)

    @app.route("/entries", methods=["POST"], endpoint="add_entry")
    def add_entry():
        date_text = (request.form.get("date") or "").strip()
        hours_text = (request.form.get("hours") or "").strip()

        if _controller().add_entry(date_text, hours_text):
            # Keep the chosen date, clear hours
            return redirect(url_for("dashboard", date=date_text))
        return redirect(url_for("dashboard", date=date_text or None, hours=hours_text or None))

    @app.route("/entries/<int:entry_id>/delete", methods=["GET", "POST"], endpoint="delete_entry")
    def delete_entry(entry_id: int):
        if request.method == "GET":
            return render_template("confirm_delete.html", entry_id=entry_id)

        if _controller().delete_entry(entry_id, FormConfirmation(request.form)):
            flash("Entry deleted.", "success")
        return redirect(url_for("dashboard"))

    @app.route("/rate", methods=["POST"], endpoint="change_rate")
    def change_rate():
        _controller().change_rate((request.form.get("rate") or "").strip())
        return redirect(url_for("dashboard"))
