# module checkout_relay.app
from checkout_relay.app_setup.factory import create_app

app = create_app()
