from pdf_ocr.cli import main

main()
