"""
ServiceM8 CRM client

Registration creates a ServiceM8 company for the new user and booking
creation creates a job for that company. Both calls are best-effort: any
failure is logged and reported as ``None`` so the local write that already
committed is never undone.
"""
import logging
import requests
from flask import current_app, has_app_context

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api.servicem8.com/api_1.0'

class ServiceM8Client:
    """Minimal client for the ServiceM8 REST API"""

    def __init__(self, api_key=None, base_url=None, timeout=None):
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout

    @property
    def api_key(self):
        if self._api_key is not None:
            return self._api_key
        return current_app.config.get('SERVICEM8_API_KEY', '') if has_app_context() else ''

    @property
    def base_url(self):
        if self._base_url is not None:
            return self._base_url
        if has_app_context():
            return current_app.config.get('SERVICEM8_BASE_URL') or DEFAULT_BASE_URL
        return DEFAULT_BASE_URL

    @property
    def timeout(self):
        if self._timeout is not None:
            return self._timeout
        return current_app.config.get('SERVICEM8_TIMEOUT', 10) if has_app_context() else 10

    def _headers(self):
        return {
            'accept': 'application/json',
            'content-type': 'application/json',
            'X-Api-Key': self.api_key
        }

    def _post(self, resource, payload, action):
        try:
            response = requests.post(
                f'{self.base_url}/{resource}',
                json=payload,
                headers=self._headers(),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Error creating ServiceM8 {action}: {e}")
            return None

        if not response.ok:
            logger.error(f"ServiceM8 API error: {response.status_code} - {response.text}")
            return None

        try:
            return response.json()
        except ValueError:
            # ServiceM8 answers some creates with an empty body
            return {}

    def create_client(self, name, uuid):
        """Create a company; ``uuid`` is the local user's external uuid"""
        return self._post('company.json', {'name': name, 'uuid': uuid}, 'company')

    def create_job(self, status, date, company_uuid):
        """Create a job for the company identified by ``company_uuid``"""
        return self._post('job.json', {
            'status': status,
            'date': date,
            'company_uuid': company_uuid
        }, 'job')

servicem8_client = ServiceM8Client()
