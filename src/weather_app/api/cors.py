# src/weather_app/api/cors.py
from fastapi import Response
from fastapi.middleware.cors import CORSMiddleware


def preflight_response(methods: str) -> Response:
    """브라우저 preflight(OPTIONS) 응답: 200, 빈 본문"""
    return Response(
        status_code=200,
        headers={
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": methods,
            "Access-Control-Allow-Headers": "Content-Type",
        },
    )


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """
    Origin + Access-Control-Request-Method 가 붙은 실제 preflight는 라우터까지 오지 않고
    미들웨어가 바로 응답한다. 허용된 preflight도 빈 본문으로 돌려준다.
    """

    def preflight_response(self, request_headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            k: v for k, v in response.headers.items()
            if k.lower() not in ("content-type", "content-length")
        }
        return Response(status_code=200, headers=headers)
