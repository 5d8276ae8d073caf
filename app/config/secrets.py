"""
AWS Secrets Manager에서 JWT 서명 키, 관리자 키, DB 비밀번호를 가져오는 모듈
"""
import json
import logging
from functools import lru_cache
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class SecretsManager:
    """AWS Secrets Manager 클라이언트 (조회 결과 캐싱)"""

    def __init__(self, region_name: str = "us-east-1"):
        self.region_name = region_name
        self._client = None
        self._cache: Dict[str, Dict[str, Any]] = {}

    @property
    def client(self):
        # USE_SECRETS_MANAGER가 꺼져 있으면 클라이언트를 만들지 않는다
        if self._client is None:
            self._client = boto3.client("secretsmanager", region_name=self.region_name)
        return self._client

    def get_secret(self, secret_name: str) -> Optional[Dict[str, Any]]:
        """
        시크릿을 딕셔너리로 가져옵니다.

        JSON이 아닌 문자열 시크릿은 {"value": ...} 형태로 감쌉니다.
        조회에 실패하면 None을 반환합니다.
        """
        if secret_name in self._cache:
            return self._cache[secret_name]

        try:
            response = self.client.get_secret_value(SecretId=secret_name)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to get secret {secret_name}: {e}")
            return None

        secret_string = response.get("SecretString")
        if not secret_string:
            logger.error(f"Secret {secret_name} has no SecretString")
            return None

        try:
            secret_data = json.loads(secret_string)
        except json.JSONDecodeError:
            secret_data = {"value": secret_string}

        self._cache[secret_name] = secret_data
        return secret_data

    def get_secret_value(self, secret_name: str, key: str, default: Any = None) -> Any:
        """시크릿에서 특정 키의 값을 가져옵니다."""
        secret = self.get_secret(secret_name)
        if secret is None:
            return default
        return secret.get(key, secret.get("value", default))


@lru_cache()
def get_secrets_manager(region_name: str = "us-east-1") -> SecretsManager:
    """SecretsManager 싱글톤 인스턴스 반환"""
    return SecretsManager(region_name)
