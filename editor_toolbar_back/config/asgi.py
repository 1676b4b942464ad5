# ASGI 설정

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

# ASGI(Asynchronous Server Gateway Interface)용 진입점
application = get_asgi_application()
