import os


class Config:
	DEBUG = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'
	LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

	GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY')
	GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-1.5-flash')
	GEMINI_API_BASE = os.environ.get('GEMINI_API_BASE', 'https://generativelanguage.googleapis.com/v1beta')
	GEMINI_TIMEOUT = float(os.environ.get('GEMINI_TIMEOUT', '60'))

	IMAGE_FETCH_TIMEOUT = float(os.environ.get('IMAGE_FETCH_TIMEOUT', '30'))
	DEFAULT_IMAGE_MIMETYPE = os.environ.get('DEFAULT_IMAGE_MIMETYPE', 'image/jpeg')

	MAX_RETRIES = int(os.environ.get('MAX_RETRIES', '3'))
	RETRY_BACKOFF_BASE = float(os.environ.get('RETRY_BACKOFF_BASE', '1.0'))
	RETRY_BACKOFF_MAX = float(os.environ.get('RETRY_BACKOFF_MAX', '8.0'))


class TestConfig(Config):
	TESTING = True
	GEMINI_API_KEY = 'test-key'
	MAX_RETRIES = 1
	RETRY_BACKOFF_BASE = 0.0
	RETRY_BACKOFF_MAX = 0.0
