import logging

from django.apps import apps
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from . import services
from .exceptions import (
    AlreadyExists,
    EmptyQuery,
    InvalidFilter,
    InvalidInput,
    NotFound,
    StringAnalyzerError,
)
from .filters import parse_filters, parse_page
from .serializers import (
    ErrorResponseSerializer,
    FilterResultSerializer,
    NaturalLanguageResultSerializer,
    StringAnalyzeSerializer,
    StringRecordSerializer,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidInput: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AlreadyExists: status.HTTP_409_CONFLICT,
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidFilter: status.HTTP_400_BAD_REQUEST,
    EmptyQuery: status.HTTP_400_BAD_REQUEST,
}

PAGE_PARAMETERS = [
    openapi.Parameter("offset", openapi.IN_QUERY, description="Number of matches to skip (default 0)",
                      type=openapi.TYPE_INTEGER),
    openapi.Parameter("limit", openapi.IN_QUERY, description="Maximum matches to return (default 100)",
                      type=openapi.TYPE_INTEGER),
]


def get_store():
    return apps.get_app_config('String_Analyser').store


def error_response(exc: StringAnalyzerError):
    code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.info("Request failed with %s: %s", exc.code, exc.message)
    return Response({"error": exc.message}, status=code)


# 1️⃣ POST & GET /strings


class StringAnalyzerView(APIView):

    @swagger_auto_schema(
        request_body=StringAnalyzeSerializer,
        operation_summary="Analyze and store a new string",
        responses={
            201: StringRecordSerializer,
            400: ErrorResponseSerializer,
            409: ErrorResponseSerializer,
            422: ErrorResponseSerializer,
        },
    )
    def post(self, request):
        if not isinstance(request.data, dict) or 'value' not in request.data:
            return Response({"error": 'Missing "value" field'}, status=status.HTTP_400_BAD_REQUEST)

        serializer = StringAnalyzeSerializer(data=request.data)
        if not serializer.is_valid():
            # wrong type, null, or characters DRF refuses (lone surrogates, NUL)
            return error_response(InvalidInput(str(serializer.errors['value'][0])))

        try:
            record = services.create_string(get_store(), serializer.validated_data['value'])
        except StringAnalyzerError as exc:
            return error_response(exc)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        operation_summary="List all analyzed strings",
        manual_parameters=[
            openapi.Parameter(
                "is_palindrome",
                openapi.IN_QUERY,
                description="Filter by palindrome (true/false)",
                type=openapi.TYPE_BOOLEAN,
            ),
            openapi.Parameter(
                "min_length",
                openapi.IN_QUERY,
                description="Minimum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "max_length",
                openapi.IN_QUERY,
                description="Maximum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "word_count",
                openapi.IN_QUERY,
                description="Exact word count",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "contains_character",
                openapi.IN_QUERY,
                description="Filter strings that contain this character",
                type=openapi.TYPE_STRING,
            ),
        ] + PAGE_PARAMETERS,
        responses={200: FilterResultSerializer, 400: ErrorResponseSerializer},
    )
    def get(self, request):
        try:
            spec = parse_filters(request.query_params)
            offset, limit = parse_page(request.query_params)
        except StringAnalyzerError as exc:
            return error_response(exc)

        result = services.list_strings(get_store(), spec, offset, limit)
        return Response({
            "data": StringRecordSerializer(result.page, many=True).data,
            "count": result.total,
            "filters_applied": spec.as_dict(),
        }, status=status.HTTP_200_OK)

# 2️⃣ GET &  DELETE  /strings/{string_value}


class StringDetailView(APIView):

    @swagger_auto_schema(
        operation_summary="Fetch an analyzed string by its exact value",
        responses={200: StringRecordSerializer, 404: ErrorResponseSerializer},
    )
    def get(self, request, value):
        try:
            record = services.get_string(get_store(), value)
        except StringAnalyzerError as exc:
            return error_response(exc)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Delete an analyzed string by its exact value",
        responses={204: 'String deleted', 404: ErrorResponseSerializer},
    )
    def delete(self, request, value):
        try:
            services.delete_string(get_store(), value)
        except StringAnalyzerError as exc:
            return error_response(exc)

        return Response(status=status.HTTP_204_NO_CONTENT)


# 3️⃣ GET /strings/filter-by-natural-language

class NaturalLanguageFilterView(APIView):
    @swagger_auto_schema(
        operation_summary="Filter analyzed strings using natural language queries",
        manual_parameters=[
            openapi.Parameter(
                "query",
                openapi.IN_QUERY,
                description="Natural language query, e.g. 'all single word palindromic strings'",
                type=openapi.TYPE_STRING,
                required=True,
            )
        ] + PAGE_PARAMETERS,
        responses={200: NaturalLanguageResultSerializer, 400: ErrorResponseSerializer},
    )
    def get(self, request):
        query = request.query_params.get("query", "")
        try:
            spec = services.translate_query(query)
            offset, limit = parse_page(request.query_params)
        except StringAnalyzerError as exc:
            return error_response(exc)

        result = services.list_strings(get_store(), spec, offset, limit)
        return Response({
            "data": StringRecordSerializer(result.page, many=True).data,
            "count": result.total,
            "interpreted_query": {
                "original": query,
                "parsed_filters": spec.as_dict(),
            },
        }, status=status.HTTP_200_OK)
