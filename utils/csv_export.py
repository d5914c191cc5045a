# utils/csv_export.py
import csv
import io
import logging

from errors import AppError, ExportError
from models import PrayerRequest

logger = logging.getLogger(__name__)

HEADER = ["Nom", "Téléphone", "Sujet de prière", "Date de soumission"]
FILENAME = "prayer_requests.csv"


class CsvExporter:
    def __init__(self, request_store):
        self.request_store = request_store

    def export_csv(self):
        """Serialize every prayer request, in the order stored, as UTF-8 CSV bytes.

        The whole document is built before returning so a failure never
        yields a partial file.
        """
        try:
            requests = self.request_store.read_all()
            buffer = io.StringIO()
            writer = csv.writer(buffer)
            writer.writerow(HEADER)
            for data in requests:
                writer.writerow(PrayerRequest.from_json(data).to_row())
            output = buffer.getvalue().encode('utf-8')
        except (AppError, csv.Error, AttributeError, TypeError) as e:
            logger.error(f"Error generating CSV export: {str(e)}", exc_info=True)
            raise ExportError("Could not generate the CSV export") from e

        logger.info(f"Exported {len(requests)} prayer requests")
        return output
