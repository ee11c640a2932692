from booking_portal import db
from booking_portal.models.user import User

class UserRepository:
    """Queries over the users table"""

    def find_all(self):
        return [user.to_dict() for user in User.query.order_by(User.id).all()]

    def find_by_id(self, user_id):
        user = db.session.get(User, user_id)
        return user.to_dict() if user else None

    def find_by_email(self, email):
        """Lookup used by login and registration; includes the password hash"""
        user = User.query.filter_by(email=email).first()
        return user.to_dict(include_password=True) if user else None

    def create(self, name, email, password, phone_number):
        user = User(
            name=name,
            email=email,
            password=password,
            phone_number=phone_number
        )
        db.session.add(user)
        db.session.commit()
        return user.to_dict()
