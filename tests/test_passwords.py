"""
Password hashing and policy
"""
from hrms.utils.security import hash_password, verify_password, validate_password_strength


class TestPasswordHashing:

    def test_hash_is_not_plaintext(self):
        hashed = hash_password("Secret123")

        assert hashed != "Secret123"
        assert verify_password("Secret123", hashed)
        assert not verify_password("Secret124", hashed)

    def test_same_password_hashes_differently(self):
        assert hash_password("Secret123") != hash_password("Secret123")

    def test_non_bcrypt_value_never_matches(self):
        assert verify_password("Secret123", "Secret123") is False

    def test_empty_values_never_match(self):
        assert verify_password("", hash_password("Secret123")) is False
        assert verify_password("Secret123", "") is False

    def test_employee_compare_password(self, make_department, make_employee):
        employee = make_employee(make_department(), password="Secret123")

        assert employee.hashed_password != "Secret123"
        assert employee.compare_password("Secret123")
        assert not employee.compare_password("secret123")


class TestPasswordPolicy:

    def test_strong_password(self):
        assert validate_password_strength("Secret123") == (True, "")

    def test_too_short(self):
        is_valid, message = validate_password_strength("Se1")
        assert not is_valid
        assert "at least 8" in message

    def test_missing_uppercase(self):
        assert validate_password_strength("secret123")[0] is False

    def test_missing_digit(self):
        assert validate_password_strength("SecretSecret")[0] is False
