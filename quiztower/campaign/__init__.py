from flask import Blueprint

campaign = Blueprint('campaign', __name__)

from quiztower.campaign import routes  # noqa: E402,F401
