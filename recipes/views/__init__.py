from .step_api_views import *
