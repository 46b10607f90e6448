from .home_routes import home_bp
from .auth_routes import auth_bp
from .user_routes import user_bp
from .pregnancy_routes import pregnancy_bp
from .mode_routes import mode_bp
from .planning_routes import planning_bp
from .emergency_routes import emergency_bp
from .symptom_routes import symptom_bp
from .appointment_routes import appointment_bp
from .chat_routes import chat_bp
from .healthcare_routes import healthcare_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(pregnancy_bp)
    app.register_blueprint(mode_bp)
    app.register_blueprint(planning_bp)
    app.register_blueprint(emergency_bp)
    app.register_blueprint(symptom_bp)
    app.register_blueprint(appointment_bp)
    app.register_blueprint(chat_bp)
    app.register_blueprint(healthcare_bp)
