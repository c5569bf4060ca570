# travel_admin/db/models/__init__.py
from .admin_user import AdminUser
from .contact import Contact
from .email_setting import EmailSetting
from .enquiry import Enquiry
from .package import Package
from .testimonial import Testimonial
