"""
List/create views for employee dependents.

All six resources share the same shape:
GET  /hr/employees/<pk>/<resource>/ - records of the employee
POST /hr/employees/<pk>/<resource>/ - create one record
"""
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from HR.employee.services import (
    ContactService,
    CompensationService,
    DocumentService,
    WorkPassService,
    QualificationService,
    CertificationService,
)
from HR.employee.serializers import (
    ContactSerializer, ContactCreateSerializer,
    CompensationSerializer, CompensationCreateSerializer,
    DocumentSerializer, DocumentCreateSerializer,
    WorkPassSerializer, WorkPassCreateSerializer,
    QualificationSerializer, QualificationCreateSerializer,
    CertificationSerializer, CertificationCreateSerializer,
)
from .helpers import request_user


def _list_or_create(request, pk, service, read_serializer, create_serializer):
    if request.method == 'GET':
        records = service.list_for_employee(pk)
        return Response(read_serializer(records, many=True).data, status=status.HTTP_200_OK)

    serializer = create_serializer(data=request.data)
    if serializer.is_valid():
        record = service.create(request_user(request), pk, serializer.to_dto())
        return Response(read_serializer(record).data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'POST'])
def employee_contacts(request, pk):
    return _list_or_create(request, pk, ContactService, ContactSerializer, ContactCreateSerializer)


@api_view(['GET', 'POST'])
def employee_compensations(request, pk):
    """POST closes the previous current compensation"""
    return _list_or_create(request, pk, CompensationService, CompensationSerializer, CompensationCreateSerializer)


@api_view(['GET', 'POST'])
def employee_documents(request, pk):
    return _list_or_create(request, pk, DocumentService, DocumentSerializer, DocumentCreateSerializer)


@api_view(['GET', 'POST'])
def employee_work_passes(request, pk):
    return _list_or_create(request, pk, WorkPassService, WorkPassSerializer, WorkPassCreateSerializer)


@api_view(['GET', 'POST'])
def employee_qualifications(request, pk):
    return _list_or_create(
        request, pk, QualificationService, QualificationSerializer, QualificationCreateSerializer
    )


@api_view(['GET', 'POST'])
def employee_certifications(request, pk):
    return _list_or_create(
        request, pk, CertificationService, CertificationSerializer, CertificationCreateSerializer
    )
