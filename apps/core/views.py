from django.conf import settings
from django.contrib import messages
from django.core.mail import send_mail
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST
from .context import LANGUAGE_COOKIE, UIContext
from .forms import FeedbackForm
from .labels import toggle_language
import logging
import smtplib

logger = logging.getLogger(__name__)

LANGUAGE_COOKIE_MAX_AGE = 365 * 24 * 3600


def about(request):
    ui = UIContext.from_request(request)
    return render(request, 'core/about.html', ui.template_context())


def contact(request):
    """Feedback form; valid submissions are logged and optionally emailed"""
    ui = UIContext.from_request(request)

    if request.method == 'POST':
        form = FeedbackForm(request.POST, labels=ui.labels)

        if form.is_valid():
            feedback = form.cleaned_data
            logger.info(f"Feedback from {feedback['name']} ({feedback['contact']}): {feedback['message']}")

            if settings.FEEDBACK_RECIPIENTS:
                try:
                    send_mail(
                        subject=f"MGNREGA dashboard feedback from {feedback['name']}",
                        message=f"Contact: {feedback['contact']}\n\n{feedback['message']}",
                        from_email=settings.DEFAULT_FROM_EMAIL,
                        recipient_list=settings.FEEDBACK_RECIPIENTS,
                        fail_silently=False,
                    )
                except (smtplib.SMTPException, OSError) as e:
                    # Feedback is already in the log
                    logger.error(f"Failed to email feedback from {feedback['name']}: {e}")

            messages.success(request, ui.labels['notice_feedback_thanks'])
            return redirect('contact')
    else:
        form = FeedbackForm(labels=ui.labels)

    return render(request, 'core/contact.html', ui.template_context(form=form))


@require_POST
def set_language(request):
    """Flip between English and Hindi and go back where the user came from"""
    ui = UIContext.from_request(request)
    new_lang = toggle_language(ui.lang)

    next_url = request.POST.get('next') or request.META.get('HTTP_REFERER') or '/'
    if not url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()},
                                           require_https=request.is_secure()):
        next_url = '/'

    response = redirect(next_url)
    response.set_cookie(LANGUAGE_COOKIE, new_lang, max_age=LANGUAGE_COOKIE_MAX_AGE, samesite='Lax')
    return response
