from django.contrib.auth.hashers import BCryptSHA256PasswordHasher


class BCryptPasswordHasher(BCryptSHA256PasswordHasher):
    """bcrypt-sha256 at cost factor 10."""
    rounds = 10
