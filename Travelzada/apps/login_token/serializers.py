from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework.exceptions import AuthenticationFailed


class LoginTokenSerializer(TokenObtainPairSerializer):
    """
    Email/password login returning the JWT pair plus the data the dashboard
    needs to decide which sections to show.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['email'] = user.email
        token['role'] = user.role
        return token

    def validate(self, attrs):
        email = attrs.get(self.username_field)
        if isinstance(email, str):
            attrs[self.username_field] = email.strip().lower()

        try:
            data = super().validate(attrs)
        except AuthenticationFailed:
            raise AuthenticationFailed({'message': 'Invalid credentials'})

        user_info = {
            "id": self.user.id,
            "email": self.user.email,
            "display_name": self.user.display_name or self.user.email,
            "role": self.user.role,
            "is_admin": self.user.is_admin,
            "permissions": list(self.user.permissions or []),
        }

        data["user"] = user_info
        return data
