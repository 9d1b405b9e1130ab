import hashlib
import io
import json

import qrcode
from reportlab.lib.colors import black, blue, red
from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas


def certificate_identifier(registry_id, sequence, issuer, fields):
    """
    Derive a certificate id from the registry, the issuance sequence number,
    the issuer and the submitted fields.

    The sequence number is unique per registry, so two bit-identical
    submissions still get different ids.
    """
    material = json.dumps(
        {
            "registry": str(registry_id),
            "sequence": sequence,
            "issuer": issuer,
            "fields": fields,
        },
        sort_keys=True,
        separators=(",", ":"),
    )
    return "0x" + hashlib.sha256(material.encode("utf-8")).hexdigest()


def format_grade(grade):
    # 385 -> "3.85"
    return f"{grade / 100:.2f}"


def render_certificate_pdf(certificate, verification_url):
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=letter)
    width, height = letter

    pdf.setTitle("Academic Certificate")
    pdf.setStrokeColor(black)
    pdf.setLineWidth(4)
    pdf.rect(30, 30, width - 60, height - 60)

    pdf.setFont("Helvetica-Bold", 28)
    pdf.setFillColor(blue)
    pdf.drawCentredString(width / 2, height - 120, "Academic Certificate")

    pdf.setFont("Helvetica", 16)
    pdf.setFillColor(black)
    pdf.drawCentredString(width / 2, height - 160, "This certifies that")

    pdf.setFont("Helvetica-Bold", 22)
    pdf.drawCentredString(width / 2, height - 200, f"{certificate.student_name} ({certificate.student_id})")

    pdf.setFont("Helvetica", 18)
    pdf.drawCentredString(width / 2, height - 240, f"has been awarded the {certificate.degree}")
    pdf.drawCentredString(width / 2, height - 265, f"in {certificate.major}")

    pdf.setFont("Helvetica-Bold", 18)
    pdf.setFillColor(blue)
    pdf.drawCentredString(width / 2, height - 300, f"Grade: {format_grade(certificate.grade)}")

    pdf.setFont("Helvetica-Oblique", 16)
    pdf.setFillColor(black)
    pdf.drawCentredString(width / 2, height - 340, f"Issued by: {certificate.institution_name}")

    if certificate.is_revoked:
        pdf.setFont("Helvetica-Bold", 20)
        pdf.setFillColor(red)
        pdf.drawCentredString(width / 2, height - 390, "REVOKED")
        pdf.setFont("Helvetica", 12)
        pdf.drawCentredString(width / 2, height - 410, certificate.revocation_reason)
        pdf.setFillColor(black)

    pdf.setFont("Courier", 8)
    pdf.drawCentredString(width / 2, 170, f"Certificate ID: {certificate.certificate_id}")

    qr_image = io.BytesIO()
    qrcode.make(verification_url).save(qr_image)
    qr_image.seek(0)
    pdf.drawImage(ImageReader(qr_image), width - 180, 50, width=100, height=100)

    pdf.setFont("Helvetica", 12)
    pdf.drawString(100, 145, f"Graduation Date: {certificate.graduation_date}")
    pdf.drawString(100, 130, f"Date Issued: {certificate.issue_date}")
    pdf.setLineWidth(1)
    pdf.line(100, 100, 300, 100)
    pdf.drawString(150, 80, "Authorized Signature")

    pdf.save()
    return buffer.getvalue()
