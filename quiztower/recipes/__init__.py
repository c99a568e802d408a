from flask import Blueprint

recipes = Blueprint('recipes', __name__)

from quiztower.recipes import routes  # noqa: E402,F401
