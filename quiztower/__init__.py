from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from quiztower.config import Config
from quiztower.errors import QuizTowerError


db = SQLAlchemy()
migrate = Migrate()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    migrate.init_app(app, db)

    from quiztower import models  # noqa: F401  (register tables with metadata)
    from quiztower.recipes import recipes
    from quiztower.campaign import campaign
    from quiztower.quiz import quiz

    app.register_blueprint(recipes, url_prefix='/api')
    app.register_blueprint(campaign, url_prefix='/api/campaign')
    app.register_blueprint(quiz, url_prefix='/api/quiz')

    @app.get("/api/health")
    def health():
        return jsonify({"ok": True, "service": "quiztower"})

    # ── JSON error handlers ───────────────────────────────────────────────────
    @app.errorhandler(QuizTowerError)
    def handle_quiztower_error(err):
        if err.status_code >= 500:
            app.logger.error("%s: %s", type(err).__name__, err.message)
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(400)
    def handle_400(err):
        return jsonify({"error": str(err)}), 400

    @app.errorhandler(404)
    def handle_404(err):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(500)
    def handle_500(err):
        return jsonify({"error": "Internal server error"}), 500

    return app
