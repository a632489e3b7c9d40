from fastapi import APIRouter, Depends, Query, Response, status
from typing import List

from dependencies import get_comment_service
from schemas.comment import (
    AddCommentRequest, UpdateCommentRequest,
    CommentResponse, CommentListResponse, AddCommentResponse, UpdateCommentResponse,
)
from services.comment_service import CommentService
from utils.auth import get_current_user

router = APIRouter(prefix="/comment", tags=["comment"])

@router.get("/paper/{paper_id}/comment/{comment_id}", response_model=CommentResponse)
def get_comment(
    paper_id: int,
    comment_id: int,
    current_user: int = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
):
    """댓글 단건 조회 (없으면 빈 응답)"""
    comment = service.get_comment(paper_id, comment_id, current_user)
    if not comment:
        return CommentResponse()
    return CommentResponse(
        id=comment.id,
        content=comment.content,
        paper_id=comment.page_id,
        user_id=comment.user_id,
        created_at=comment.created_at,
    )

@router.get("/paper/{paper_id}", response_model=List[CommentListResponse])
def get_comments(
    paper_id: int,
    current_user: int = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
):
    """페이지의 모든 댓글 조회"""
    return service.get_comments(paper_id, current_user)

@router.post("", response_model=AddCommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    request: AddCommentRequest,
    paper_id: int = Query(..., alias="paperId"),
    current_user: int = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
):
    """댓글 작성"""
    comment = service.add_comment(request, paper_id, current_user)
    return AddCommentResponse(
        id=comment.id,
        paper_id=paper_id,
        user_id=current_user,
        created_at=comment.created_at,
    )

@router.put("/{comment_id}", response_model=UpdateCommentResponse)
def update_comment(
    comment_id: int,
    request: UpdateCommentRequest,
    current_user: int = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
):
    """댓글 수정"""
    comment = service.update_comment(comment_id, request, current_user)
    return UpdateCommentResponse(id=comment_id, content=comment.content)

@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: int,
    current_user: int = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
):
    """댓글 삭제"""
    service.delete_comment(comment_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
