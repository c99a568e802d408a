from flask import Blueprint

quiz = Blueprint('quiz', __name__)

from quiztower.quiz import routes  # noqa: E402,F401
