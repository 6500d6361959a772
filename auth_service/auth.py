from passlib.context import CryptContext

# Use pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

# Checked against when the username does not exist, so unknown users cost
# the same hashing work as a wrong password.
_DUMMY_HASH = hash_password("timing-equalization-dummy")

def verify_password_or_dummy(plain_password: str, hashed_password: str = None) -> bool:
    if hashed_password is None:
        pwd_context.verify(plain_password, _DUMMY_HASH)
        return False
    return verify_password(plain_password, hashed_password)
