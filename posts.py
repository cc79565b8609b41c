import pydantic
from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for
from sqlalchemy.exc import SQLAlchemyError

from database import get_db
from errors import PostNotFound, PostValidationError
from post_presenter import PostPresenter
from post_store import PostStore
from pydantic_schemas.post_create import PostCreateRequest

posts_blueprint = Blueprint('posts', __name__)


def _is_api_request():
    return request.path.startswith('/api/')


def _create_from_submission(store, data):
    """Checks the submitted fields, reply id format included, then stores the post."""
    try:
        submission = PostCreateRequest(
            poster_name=data.get('poster_name'),
            content=data.get('content'),
            reply_to_id=data.get('reply_to_id'),
        )
    except pydantic.ValidationError as e:
        raise PostValidationError.from_pydantic(e) from e

    reply_to_id = str(submission.reply_to_id) if submission.reply_to_id else None
    return store.create_post(submission.poster_name, submission.content, reply_to_id=reply_to_id)


@posts_blueprint.errorhandler(PostNotFound)
def post_not_found(error):
    """Turns a missing post (page or reply target) into a 404."""
    current_app.logger.info("Post not found: %s", error.post_id)
    if _is_api_request():
        return jsonify({'success': False, 'error': 'Post not found.'}), 404
    return render_template('errors/not_found.html', post_id=error.post_id), 404


@posts_blueprint.errorhandler(SQLAlchemyError)
def database_error(error):
    current_app.logger.exception("Database error while handling %s %s", request.method, request.path)
    if _is_api_request():
        return jsonify({'success': False, 'error': 'An internal server error occurred.'}), 500
    return render_template('errors/server_error.html'), 500


# ==================================
# Page Routes
# ==================================

@posts_blueprint.route('/posts', methods=['GET'])
def index():
    """Lists top-level posts, newest first, each with its direct replies."""
    db = next(get_db())
    try:
        threads = PostPresenter(PostStore(db)).render_index()
        return render_template('posts/index.html', threads=threads)
    finally:
        db.close()


@posts_blueprint.route('/posts/new', methods=['GET'])
def new():
    return render_template('posts/new.html', form={}, errors={}, reply_to=None)


@posts_blueprint.route('/posts', methods=['POST'])
def create():
    """Creates a post from the submitted form, then redirects to where it is shown."""
    db = next(get_db())
    form = request.form
    store = PostStore(db)
    try:
        post = _create_from_submission(store, form)
        if post.reply_to_id:
            return redirect(url_for('posts.show', post_id=post.reply_to_id))
        return redirect(url_for('posts.index'))
    except PostValidationError as e:
        current_app.logger.info("Rejected post: %s", e)
        reply_to = _find_reply_target(store, form.get('reply_to_id'))
        return render_template('posts/new.html', form=form, errors=e.errors, reply_to=reply_to), 400
    finally:
        db.close()


@posts_blueprint.route('/posts/<post_id>', methods=['GET'])
def show(post_id):
    """Shows one post with its direct replies, oldest first."""
    db = next(get_db())
    try:
        thread = PostPresenter(PostStore(db)).render_show(post_id)
        return render_template('posts/show.html', thread=thread)
    finally:
        db.close()


@posts_blueprint.route('/posts/<post_id>/reply', methods=['GET'])
def reply(post_id):
    db = next(get_db())
    try:
        reply_to = PostStore(db).get_post(post_id)
        return render_template('posts/new.html', form={'reply_to_id': reply_to.id}, errors={}, reply_to=reply_to)
    finally:
        db.close()


def _find_reply_target(store, reply_to_id):
    # Only used to redisplay the parent above a rejected reply form.
    if not reply_to_id:
        return None
    try:
        return store.get_post(reply_to_id)
    except PostNotFound:
        return None


# ==================================
# API ROUTES
# ==================================

@posts_blueprint.route('/api/posts', methods=['GET'])
def api_index():
    db = next(get_db())
    try:
        threads = PostPresenter(PostStore(db)).render_index()
        return jsonify({'success': True, 'posts': [thread.to_dict() for thread in threads]}), 200
    finally:
        db.close()


@posts_blueprint.route('/api/posts/<post_id>', methods=['GET'])
def api_show(post_id):
    db = next(get_db())
    try:
        thread = PostPresenter(PostStore(db)).render_show(post_id)
        return jsonify({'success': True, 'post': thread.to_dict()}), 200
    finally:
        db.close()


@posts_blueprint.route('/api/posts', methods=['POST'])
def api_create():
    """
    API endpoint for creating a new post.
    Expects a JSON body with poster_name, content and an optional reply_to_id.
    """
    db = next(get_db())
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        post = _create_from_submission(PostStore(db), data)
        return jsonify({'success': True, 'message': 'Post created successfully.', 'post_id': post.id}), 201
    except PostValidationError as e:
        current_app.logger.info("Rejected post: %s", e)
        return jsonify({'success': False, 'errors': e.errors}), 400
    finally:
        db.close()
