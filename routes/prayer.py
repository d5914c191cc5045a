# routes/prayer.py
from flask import Blueprint, Response, current_app, render_template, request
import logging

from errors import ExportError
from schemas import PrayerForm
from utils.csv_export import FILENAME

prayer_bp = Blueprint('prayer', __name__)
logger = logging.getLogger(__name__)


@prayer_bp.route('/prayer', methods=['POST'])
def submit_prayer():
    form = PrayerForm.model_validate(request.form.to_dict())
    request_logger = current_app.extensions['request_logger']

    submitted_at = request_logger.log_request(form.name, form.number, form.prayer)
    return render_template('thank_you.html', name=form.name, submitted_at=submitted_at)


@prayer_bp.route('/export.csv', methods=['GET'])
def export_csv():
    exporter = current_app.extensions['csv_exporter']
    try:
        output = exporter.export_csv()
    except ExportError:
        return Response("Erreur lors de la génération du CSV", status=500, mimetype='text/plain')

    return Response(
        output,
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename="{FILENAME}"'}
    )
