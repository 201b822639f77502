#!/usr/bin/env python3
"""
調試腳本：解碼一個 JWT token，檢查簽名與 audience / 時間窗口
用法: python debug_token.py <token> [--audience AUD]
簽名密鑰取自 ENV JWT_SECRET
"""

import argparse
import json
import sys
from typing import List, Optional

import jwts
from jwts import config as jwt_config
from logging_config import get_colorful_logger

logger = get_colorful_logger("debug_token", level=jwt_config.get_log_level())


def inspect_token(token: str, audience: Optional[str] = None) -> int:
    """打印 token 詳情；返回 0 表示通過所有已執行的檢查"""
    try:
        details = jwts.parse_token_details(token)
    except jwts.JWTError as e:
        logger.error(f"無法解析 token: {type(e).__name__}: {e}")
        return 2

    print("JWT header:")
    print(json.dumps(details.header.model_dump(), indent=2, ensure_ascii=False))
    print("JWT claims:")
    print(json.dumps(details.claims.model_dump(exclude_none=True), indent=2, ensure_ascii=False))

    ok = jwts.validate_token(token, jwt_config.get_jwt_secret())
    print(f"簽名: {'✓ 有效' if ok else '✗ 不匹配'}")

    if audience is not None:
        try:
            jwts.verify_token(token, audience)
            print(f"策略 (aud={audience}): ✓ 通過")
        except jwts.PolicyError as e:
            print(f"策略 (aud={audience}): ✗ {type(e).__name__}: {e}")
            ok = False

    return 0 if ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect an HS256 token")
    parser.add_argument("token")
    parser.add_argument("--audience", default=None)
    args = parser.parse_args(argv)
    return inspect_token(args.token, args.audience)


if __name__ == "__main__":
    sys.exit(main())
