from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from HR.employee.services import JobHistoryService
from HR.employee.serializers import (
    JobAssignmentRecordSerializer,
    JobAssignmentWriteSerializer,
    PromoteSerializer,
)
from hr_project.pagination import paginated_response
from .helpers import request_user


@api_view(['GET', 'POST'])
def employee_job_history(request, pk):
    """
    Job history of an employee, or promote.

    GET /hr/employees/<pk>/job-history/
    - Oldest first

    POST /hr/employees/<pk>/job-history/
    - Closes the current record the day before effective_from and opens a
      new current one; omitted fields are carried over
    """
    if request.method == 'GET':
        records = JobHistoryService.get_history(pk)
        return Response(JobAssignmentRecordSerializer(records, many=True).data, status=status.HTTP_200_OK)

    elif request.method == 'POST':
        serializer = PromoteSerializer(data=request.data)
        if serializer.is_valid():
            dto = serializer.to_dto()
            record = JobHistoryService.promote(request_user(request), pk, dto, dto.effective_from)
            return Response(JobAssignmentRecordSerializer(record).data, status=status.HTTP_201_CREATED)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def employee_current_job(request, pk):
    """GET /hr/employees/<pk>/job-history/current/"""
    record = JobHistoryService.get_current(pk)
    if record is None:
        return Response({'detail': 'Employee has no current job record'}, status=status.HTTP_200_OK)
    return Response(JobAssignmentRecordSerializer(record).data, status=status.HTTP_200_OK)


@api_view(['POST'])
def employee_initial_job(request, pk):
    """POST /hr/employees/<pk>/job-history/initial/"""
    serializer = JobAssignmentWriteSerializer(data=request.data)
    if serializer.is_valid():
        record = JobHistoryService.create_initial(request_user(request), pk, serializer.to_dto())
        return Response(JobAssignmentRecordSerializer(record).data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def job_history_list(request):
    """
    Current job records across employees.

    GET /hr/job-history/
    - Filters: status, designation, department, search
    """
    records = JobHistoryService.list_current(request.query_params)
    return paginated_response(request, records, JobAssignmentRecordSerializer)


@api_view(['GET', 'PATCH', 'DELETE'])
def job_record_detail(request, pk):
    """
    Retrieve, correct or delete a job record.

    PATCH corrects fields in place; dates and the current flag are kept.
    DELETE is an administrative hard delete.
    """
    if request.method == 'GET':
        record = JobHistoryService.get_record(pk)
        return Response(JobAssignmentRecordSerializer(record).data, status=status.HTTP_200_OK)

    elif request.method == 'PATCH':
        serializer = JobAssignmentWriteSerializer(data=request.data)
        if serializer.is_valid():
            record = JobHistoryService.update_record(request_user(request), pk, serializer.to_dto())
            return Response(JobAssignmentRecordSerializer(record).data, status=status.HTTP_200_OK)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    elif request.method == 'DELETE':
        JobHistoryService.delete_record(request_user(request), pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['POST'])
def job_record_set_current(request, pk):
    """POST /hr/job-history/<pk>/set-current/"""
    record = JobHistoryService.set_current(request_user(request), pk)
    return Response(JobAssignmentRecordSerializer(record).data, status=status.HTTP_200_OK)
