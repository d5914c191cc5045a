# routes/verse.py
from flask import Blueprint, current_app, render_template, request, session
import logging
from datetime import timezone

from schemas import VerseForm
from utils.session_markers import SessionMarkers
from models import Denied

verse_bp = Blueprint('verse', __name__)
logger = logging.getLogger(__name__)

RETRY_DATE_FORMAT = '%d/%m/%Y'
RETRY_TIME_FORMAT = '%H:%M'


def format_retry_at(when):
    when = when.astimezone(timezone.utc)
    return f"{when.strftime(RETRY_DATE_FORMAT)} à {when.strftime(RETRY_TIME_FORMAT)} (UTC)"


@verse_bp.route('/', methods=['GET'])
def index():
    return render_template('index.html')


@verse_bp.route('/verse', methods=['POST'])
def get_verse():
    form = VerseForm.model_validate(request.form.to_dict())
    dispenser = current_app.extensions['verse_dispenser']

    result = dispenser.dispense(SessionMarkers(session), name=form.name, phone=form.number)
    if isinstance(result, Denied):
        retry_at = format_retry_at(result.retry_at) if result.retry_at else None
        return render_template('limit_reached.html', message=result.message, retry_at=retry_at)

    return render_template(
        'verse.html',
        user_name=result.name,
        phone_number=result.phone,
        verse=result.verse
    )
