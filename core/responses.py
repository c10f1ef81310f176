from abc import ABCMeta, abstractmethod
from typing import Any, Optional, Union
from fastapi import HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse, Response


class HttpResponseAbstract(metaclass=ABCMeta):
    @abstractmethod
    def response(self) -> Union[JSONResponse, Response, None]:
        pass


def _content_response(data: Any, status_code: int) -> Response:
    if isinstance(data, str):
        return PlainTextResponse(content=data, status_code=status_code)
    return JSONResponse(content=data, status_code=status_code)


class Ok(HttpResponseAbstract):
    def __init__(self, data: Optional[Any]) -> None:
        if data is not None:
            self.data = data
        else:
            self.data = ""

    def response(self) -> Response:
        """
        parse class to JSONReponse, plain text when data is a string
        """
        return _content_response(self.data, 200)


class Created(HttpResponseAbstract):
    def __init__(self, data: Optional[Any]) -> None:
        if data is not None:
            self.data = data
        else:
            self.data = ""

    def response(self) -> Response:
        """
        parse class to JSONReponse, plain text when data is a string
        """
        return _content_response(self.data, 201)


class BadRequest(HttpResponseAbstract):
    def __init__(
        self, message: Optional[str] = None, custom_response: Optional[Any] = None
    ) -> None:
        """
        message: bad request message, for default json response
        custom_response: override default json response
        default json response:
        json:{
            'message': f'{message}'
        }
        status_code: 400
        """
        self.custom_response = None
        if custom_response is None:
            self.message = message
        else:
            self.custom_response = custom_response

    def response(self) -> JSONResponse:
        """
        parse class to JSONReponse
        """
        if self.custom_response is None:
            return JSONResponse(content={"message": self.message}, status_code=400)
        else:
            return JSONResponse(content=self.custom_response, status_code=400)


class NotFound(HttpResponseAbstract):
    def __init__(
        self, message: str = "Not Found", custom_response: Optional[Any] = None
    ) -> None:
        """
        custom_response: override default json response
        default json response:
        json:{
            'message': 'Not Found'
        }
        status_code: 404
        """
        self.custom_response = None
        if custom_response is not None:
            self.custom_response = custom_response
        else:
            self.message = message

    def response(self) -> JSONResponse:
        """
        parse class to JSONReponse
        """
        if self.custom_response is None:
            return JSONResponse(content={"message": self.message}, status_code=404)
        else:
            return JSONResponse(content=self.custom_response, status_code=404)


class Conflict(HttpResponseAbstract):
    def __init__(
        self, message: str = "Conflict", custom_response: Optional[Any] = None
    ) -> None:
        """
        custom_response: override default json response
        default json response:
        json:{
            'message': 'Conflict'
        }
        status_code: 409
        """
        self.custom_response = None
        if custom_response is not None:
            self.custom_response = custom_response
        else:
            self.message = message

    def response(self) -> JSONResponse:
        """
        parse class to JSONReponse
        """
        if self.custom_response is None:
            return JSONResponse(content={"message": self.message}, status_code=409)
        else:
            return JSONResponse(content=self.custom_response, status_code=409)


class InternalServerError(HttpResponseAbstract):
    def __init__(
        self, error: Optional[str] = None, custom_response: Optional[Any] = None
    ) -> None:
        """
        error: underlying error message, for default json response
        custom_response: override default json response
        default json response:
        json:{
            'detail': 'Server Error {error}'
        }
        status_code: 500
        """
        self.custom_response = None
        if custom_response is not None:
            self.custom_response = custom_response
        else:
            self.error = error

    def response(self) -> JSONResponse:
        """
        raise HTTPException, rendered by fastapi as json
        """
        if self.custom_response is None:
            raise HTTPException(status_code=500, detail=f"Server Error {self.error}")
        else:
            raise HTTPException(status_code=500, detail=self.custom_response)


def common_response(res: HttpResponseAbstract):
    return res.response()
