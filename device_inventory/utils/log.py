import json
import logging
from datetime import datetime, timezone

class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record):
        log = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)

def setup_logging(level='INFO', fmt='text'):
    root = logging.getLogger()
    # create_app may run many times in one process (tests); install one handler
    if any(getattr(h, '_device_inventory', False) for h in root.handlers):
        root.setLevel(getattr(logging, level.upper(), logging.INFO))
        return
    handler = logging.StreamHandler()
    handler._device_inventory = True
    if fmt == 'json':
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
