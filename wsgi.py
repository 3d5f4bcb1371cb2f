# wsgi.py
from pos_promotions import create_promotion_app

application = create_promotion_app()
