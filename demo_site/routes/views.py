"""
HTML view routes for the demo site.

Routes:
    GET  /                      - Index of examples
    GET  /login                 - Login form
    POST /authenticate          - Check credentials
    GET  /secure                - Secure area (login required)
    GET  /logout                - End the login session
    GET  /dynamic_loading/<n>   - Dynamic loading example 1 or 2
"""

import logging

from flask import (
    Blueprint,
    abort,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)

DYNAMIC_LOADING_EXAMPLES = {
    1: "Element on page that is hidden",
    2: "Element rendered after the fact",
}


@views_bp.route("/")
def index():
    """Render the list of examples."""
    return render_template("index.html", examples=DYNAMIC_LOADING_EXAMPLES)


@views_bp.route("/login")
def login():
    """Render the login form."""
    return render_template("login.html")


@views_bp.route("/authenticate", methods=["POST"])
def authenticate():
    """
    Check submitted credentials.

    Form Fields:
        username: Account name
        password: Account password

    Returns:
        Redirect to the secure area on success, back to the login form
        with an error flash otherwise.
    """
    username = request.form.get("username", "")
    password = request.form.get("password", "")

    if username != current_app.config["DEMO_USERNAME"]:
        logger.info("POST /authenticate - unknown username")
        flash("Your username is invalid!", "error")
        return redirect(url_for("views.login"))

    if password != current_app.config["DEMO_PASSWORD"]:
        logger.info("POST /authenticate - wrong password for %s", username)
        flash("Your password is invalid!", "error")
        return redirect(url_for("views.login"))

    session["username"] = username
    logger.info("POST /authenticate - %s logged in", username)
    flash("You logged into a secure area!", "success")
    return redirect(url_for("views.secure"))


@views_bp.route("/secure")
def secure():
    """Render the secure area for a logged in user."""
    if "username" not in session:
        flash("You must login to view the secure area!", "error")
        return redirect(url_for("views.login"))
    return render_template("secure.html", username=session["username"])


@views_bp.route("/logout")
def logout():
    """Clear the login session."""
    session.pop("username", None)
    flash("You logged out of the secure area!", "success")
    return redirect(url_for("views.login"))


@views_bp.route("/dynamic_loading/<int:example>")
def dynamic_loading(example: int):
    """
    Render a dynamic loading example.

    Example 1 hides the finish element until loading completes.
    Example 2 only adds the finish element to the DOM once loading completes.
    """
    if example not in DYNAMIC_LOADING_EXAMPLES:
        abort(404)
    return render_template(
        f"dynamic_loading/example_{example}.html",
        title=DYNAMIC_LOADING_EXAMPLES[example],
        delay_ms=current_app.config["DYNAMIC_LOADING_DELAY_MS"],
    )
