import pytest
from datetime import timedelta
from fastapi import status
from jose import JWTError, jwt
from utils.auth import (
    ALGORITHM, create_access_token, create_refresh_token, get_user_pk, validate_token,
)

class TestJwtToken:
    """JWT 발급/검증 테스트"""

    def test_access_token_round_trip(self):
        """발급한 토큰에서 사용자 id 추출"""
        token = create_access_token(42)
        assert get_user_pk(token) == 42
        assert validate_token(token) is True

    def test_access_token_carries_user_id_claim(self):
        token = create_access_token(7)
        claims = jwt.get_unverified_claims(token)
        assert claims["userId"] == 7
        assert "iat" in claims
        assert claims["exp"] - claims["iat"] == 30 * 60

    def test_refresh_token_has_no_subject(self):
        """refresh 토큰은 사용자 정보 없이 7일 유효"""
        token = create_refresh_token()
        claims = jwt.get_unverified_claims(token)
        assert "userId" not in claims
        assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60
        assert validate_token(token) is True
        with pytest.raises(JWTError):
            get_user_pk(token)

    def test_forged_signature_is_invalid(self):
        """다른 키로 서명한 토큰은 거부"""
        forged = jwt.encode({"userId": 42}, "not-the-server-salt", algorithm=ALGORITHM)
        assert validate_token(forged) is False
        with pytest.raises(JWTError):
            get_user_pk(forged)

    def test_expired_token_is_invalid(self):
        token = create_access_token(42, expires_delta=timedelta(minutes=-1))
        assert validate_token(token) is False
        with pytest.raises(JWTError):
            get_user_pk(token)

    def test_malformed_token(self):
        assert validate_token("not.a.token") is False
        with pytest.raises(JWTError):
            get_user_pk("not.a.token")

class TestAuthDependency:
    """인증 의존성 테스트"""

    def test_no_token(self, client):
        response = client.get("/notices")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_invalid_token(self, client):
        client.headers.update({"Authorization": "Bearer invalid_token"})
        response = client.get("/notices")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_malformed_header(self, client):
        client.headers.update({"Authorization": "InvalidFormat"})
        response = client.get("/notices")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_expired_token(self, client, test_user):
        token = create_access_token(test_user.id, expires_delta=timedelta(seconds=-5))
        client.headers.update({"Authorization": f"Bearer {token}"})
        response = client.get("/notices")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_token_cannot_authenticate(self, client):
        client.headers.update({"Authorization": f"Bearer {create_refresh_token()}"})
        response = client.get("/notices")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_valid_token(self, authenticated_client):
        response = authenticated_client.get("/notices")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []
