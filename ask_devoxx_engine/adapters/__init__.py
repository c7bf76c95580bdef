"""Infrastructure adapter exports."""

from .inquiry import InquiryAdapter, build_inquiry_url

__all__ = ["InquiryAdapter", "build_inquiry_url"]
