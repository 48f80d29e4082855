"""
API health monitoring
"""
import logging
from datetime import datetime

import requests

logger = logging.getLogger(__name__)


class ApiMonitor:
    """Probes the REST API and remembers the last known status"""

    def __init__(self, base_url, timeout=3):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.status = 'unknown'
        self.last_check = None

    def check(self):
        """Check the API once and return its status"""
        health_url = f'{self.base_url}/stats'
        message = None
        try:
            response = requests.get(health_url, timeout=self.timeout)
            if response.status_code == 200:
                status = 'healthy'
            else:
                status = 'unhealthy'
                message = f'HTTP {response.status_code}'
        except requests.exceptions.RequestException as e:
            status = 'down'
            message = str(e)

        if status != self.status:
            logger.info(f"API status changed: {self.status} -> {status}")
        self.status = status
        self.last_check = datetime.now().isoformat()

        result = {'status': status, 'url': self.base_url, 'last_check': self.last_check}
        if message:
            result['message'] = message
        return result
