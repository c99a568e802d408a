from flask import current_app, jsonify, request

from quiztower import db
from quiztower.campaign import campaign, service
from quiztower.campaign.floors import resolve_floor
from quiztower.errors import GenerationError
from quiztower.models import FloorAttempt
from quiztower.quiz import utils as quiz_utils
from quiztower.recipes.routes import int_field


@campaign.route('/progress', methods=['GET'])
def progress():
    user_id = request.args.get("user_id")
    if not user_id:
        return jsonify({"error": "user_id is required"}), 400
    return jsonify(service.progress_view(user_id))


@campaign.route('/floors/<int:floor_number>', methods=['GET'])
def floor_topology(floor_number):
    """Topology only: no user state, no generation."""
    return jsonify(resolve_floor(floor_number).to_dict())


@campaign.route('/floor', methods=['POST'])
def floor():
    """
    Generate the five questions for a floor the user has unlocked.
    Body: {user_id, floor_number}
    """
    data = request.get_json(silent=True) or {}
    user_id = data.get("user_id")
    floor_number = int_field(data, "floor_number")
    if not user_id or floor_number is None:
        return jsonify({"error": "user_id and integer floor_number are required"}), 400

    topology = resolve_floor(floor_number)                  # InvalidFloorError → 400
    service.check_floor_access(str(user_id), floor_number)  # FloorLockedError → 403

    if not current_app.config.get("GROQ_API_KEY"):
        return jsonify({"error": "Question generation is not configured"}), 503

    try:
        generated = quiz_utils.generate_floor_quiz(topology)
    except GenerationError as e:
        current_app.logger.error("Floor %d generation failed: %s", floor_number, e.message)
        raise
    except Exception as e:
        current_app.logger.error("Groq error on floor %d: %s", floor_number, e)
        raise GenerationError(f"Groq error: {e}") from e

    quiz_utils.store_answer_key(generated["quiz_id"], generated["questions"],
                                game_mode="campaign", floor_number=floor_number)

    return jsonify({
        "quiz_id":   generated["quiz_id"],
        "floor":     topology.to_dict(),
        "questions": quiz_utils.strip_answers(generated["questions"]),
    })


@campaign.route('/submit', methods=['POST'])
def submit():
    """
    Body: {user_id, floor_number, quiz_id, answers: [{question_id, user_answer}],
           questions?, time_taken?}
    """
    data = request.get_json(silent=True) or {}
    user_id = data.get("user_id")
    quiz_id = data.get("quiz_id")
    floor_number = int_field(data, "floor_number")
    answers = data.get("answers")

    if not user_id or not quiz_id or floor_number is None:
        return jsonify({"error": "user_id, quiz_id and integer floor_number are required"}), 400
    if not isinstance(answers, list):
        return jsonify({"error": "answers must be a list"}), 400

    result = service.submit_floor(
        str(user_id),
        floor_number,
        quiz_id,
        answers,
        questions=data.get("questions"),
        time_taken=int_field(data, "time_taken"),
    )
    return jsonify(result)


@campaign.route('/achievements', methods=['GET'])
def achievements():
    return jsonify(service.achievements_view(request.args.get("user_id")))


@campaign.route('/achievements/sync', methods=['POST'])
def sync_achievements():
    data = request.get_json(silent=True) or {}
    user_id = data.get("user_id")
    if not user_id:
        return jsonify({"error": "user_id is required"}), 400
    return jsonify(service.sync_achievements(str(user_id)))


@campaign.route('/attempts/<int:attempt_id>', methods=['GET'])
def attempt_results(attempt_id):
    user_id = request.args.get("user_id")
    attempt = db.session.get(FloorAttempt, attempt_id)
    if attempt is None or (user_id and attempt.user_id != user_id):
        return jsonify({"error": "Attempt not found"}), 404
    return jsonify(attempt.to_dict())
