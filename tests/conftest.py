"""
Pytest fixtures and configuration for Arabic SEO Analyzer tests.
"""

import json
from pathlib import Path

import pytest
from docx import Document

from arabic_seo_analyzer.analyzer import clear_cache
from arabic_seo_analyzer.content_sources import doc_node, heading_node, list_node, paragraph_node


@pytest.fixture(autouse=True)
def _fresh_analysis_cache():
    """Each test starts with an empty analysis cache."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def sample_article() -> dict:
    """A small but complete article: intro, sections, FAQ and conclusion."""
    return doc_node([
        heading_node("دليل السفر إلى الرياض", 1),
        paragraph_node("الرياض مدينة كبيرة تجمع بين التاريخ والحداثة في مكان واحد."),
        paragraph_node("يقدم هذا الدليل نصائح عملية لزيارة المدينة والتخطيط للرحلة بسهولة."),
        heading_node("أفضل الأماكن في الرياض", 2),
        paragraph_node("تضم المدينة متاحف وأسواقا وحدائق واسعة تناسب جميع أفراد العائلة."),
        heading_node("كيف تختار الفندق المناسب؟", 2),
        paragraph_node("اختر فندقا قريبا من وسط المدينة لتوفير الوقت في التنقل اليومي."),
        list_node(["قارن الأسعار", "اقرأ التقييمات"]),
        heading_node("الأسئلة الشائعة", 2),
        heading_node("متى أفضل وقت للزيارة؟", 3),
        paragraph_node("أفضل وقت للزيارة هو فصل الشتاء حين يكون الجو معتدلا."),
        heading_node("الخاتمة", 2),
        paragraph_node("ختاما، الرياض وجهة رائعة تستحق الزيارة خلال 3 أيام على الأقل."),
    ])


@pytest.fixture
def sample_keywords() -> dict:
    return {
        "primary": "الرياض",
        "secondaries": ["العاصمة السعودية", "", "", ""],
        "company": "رحلات الخليج",
        "lsi": ["فندق", "متاحف"],
    }


@pytest.fixture
def sample_json_document(tmp_path: Path, sample_article: dict) -> Path:
    """Write the sample article as an editor JSON export."""
    path = tmp_path / "article.json"
    path.write_text(json.dumps(sample_article, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def sample_keywords_csv(tmp_path: Path) -> Path:
    """Create a sample keywords CSV file."""
    csv_path = tmp_path / "keywords.csv"
    csv_content = """role,keyword
primary,الرياض
secondary,العاصمة السعودية
secondary,مدينة الرياض
company,رحلات الخليج
lsi,فندق
lsi,متاحف
"""
    csv_path.write_text(csv_content, encoding="utf-8")
    return csv_path


@pytest.fixture
def sample_keywords_excel(tmp_path: Path) -> Path:
    """Create a sample keywords Excel file with Arabic role labels."""
    import pandas as pd

    xlsx_path = tmp_path / "keywords.xlsx"
    data = {
        "النوع": ["رئيسية", "مرادف", "الشركة", "lsi"],
        "الكلمة": ["الرياض", "العاصمة السعودية", "رحلات الخليج", "فندق"],
    }
    df = pd.DataFrame(data)
    df.to_excel(xlsx_path, index=False)
    return xlsx_path


@pytest.fixture
def sample_keywords_txt(tmp_path: Path) -> Path:
    """Create a pasted-style keyword block file."""
    txt_path = tmp_path / "keywords.txt"
    txt_path.write_text(
        "الرياض\nالعاصمة السعودية\nمدينة الرياض\n---\nفندق\nمتاحف\n===\nرحلات الخليج\n",
        encoding="utf-8",
    )
    return txt_path


@pytest.fixture
def sample_docx(tmp_path: Path) -> Path:
    """Create a sample Word document."""
    docx_path = tmp_path / "sample.docx"
    doc = Document()

    doc.add_heading("دليل السفر إلى الرياض", level=1)
    doc.add_paragraph("الرياض مدينة كبيرة تجمع بين التاريخ والحداثة.")
    doc.add_heading("أفضل الأماكن", level=2)
    doc.add_paragraph("المتحف الوطني", style="List Bullet")
    doc.add_paragraph("حديقة الملك عبدالله", style="List Bullet")
    doc.add_paragraph("الخطوة الأولى", style="List Number")
    para = doc.add_paragraph("السطر الأول")
    para.add_run().add_break()
    para.add_run("السطر الثاني")
    doc.add_heading("تفاصيل إضافية", level=5)

    doc.save(str(docx_path))
    return docx_path
