# run.py
from __future__ import annotations
import sys
from pathlib import Path
import json
import logging
import argparse

sys.path.append(str(Path(__file__).parent / "src"))
from importlib import import_module
wht_main = import_module("withholding_extractor.main")
wht_errors = import_module("withholding_extractor.errors")
wht_config = import_module("withholding_extractor.config")
wht_keywords = import_module("withholding_extractor.keywords")
wht_exporters = import_module("withholding_extractor.exporters")
wht_registry = import_module("withholding_extractor.registry")

log = logging.getLogger(__name__)


def _settings_from_args(args: argparse.Namespace):
    ExtractionSettings = wht_config.ExtractionSettings
    PageThresholds = wht_config.PageThresholds
    base = ExtractionSettings.from_env(wht_registry.get_ruleset(args.year).settings)
    return ExtractionSettings(
        first_page=PageThresholds(
            row_gap=args.p1_row_gap if args.p1_row_gap is not None else base.first_page.row_gap,
            cell_gap=args.p1_cell_gap if args.p1_cell_gap is not None else base.first_page.cell_gap,
        ),
        second_page=PageThresholds(
            row_gap=args.p2_row_gap if args.p2_row_gap is not None else base.second_page.row_gap,
            cell_gap=args.p2_cell_gap if args.p2_cell_gap is not None else base.second_page.cell_gap,
        ),
    )


def main() -> None:
    variants = [v.value for v in wht_keywords.SourceVariant]
    parser = argparse.ArgumentParser(description="Extraer datos del empleado de PDFs de 근로소득 원천징수영수증.")
    parser.add_argument("pdf_paths", type=str, nargs="+", help="Rutas a los PDF de entrada")
    parser.add_argument("--variant", type=str, default="unspecified", choices=variants,
                        help="Sistema emisor del PDF (default: unspecified)")
    parser.add_argument("--year", type=int, help="Año del formato del recibo (selecciona las reglas)")
    parser.add_argument("--relax", action="store_true",
                        help="Modo diagnóstico: no valida y muestra los valores intermedios")
    parser.add_argument("--dump-tables", type=str, metavar="DIR", help="Escribe las tablas reconstruidas como CSV")
    parser.add_argument("--csv", type=str, help="Ruta opcional de un CSV con todos los registros")
    parser.add_argument("--p1-row-gap", type=float, help="Umbral de fila de la página 1")
    parser.add_argument("--p1-cell-gap", type=float, help="Umbral de celda de la página 1")
    parser.add_argument("--p2-row-gap", type=float, help="Umbral de fila de la página 2")
    parser.add_argument("--p2-cell-gap", type=float, help="Umbral de celda de la página 2")
    parser.add_argument("--loglevel", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Nivel de verbosidad del log (default: INFO)")

    args = parser.parse_args()
    logging.basicConfig(level=args.loglevel, format='%(asctime)s - %(levelname)s - %(message)s')

    variant = wht_keywords.SourceVariant(args.variant)
    settings = _settings_from_args(args)
    records = []
    failed = 0

    for pdf_path in args.pdf_paths:
        log.info(f"PDF: {pdf_path}")
        try:
            if args.relax:
                trace = wht_main.inspect_pdf(pdf_path, variant=variant, year=args.year,
                                             settings=settings, dump_dir=args.dump_tables)
                print(json.dumps(trace.to_dict(), ensure_ascii=False, indent=2))
                record = trace.to_record()
            else:
                record = wht_main.extract_employee_data(pdf_path, variant=variant, year=args.year,
                                                        settings=settings, dump_dir=args.dump_tables)
                print(json.dumps(record.to_dict(), ensure_ascii=False))
            records.append(record)
        except FileNotFoundError:
            log.error(f"Error: No se encontró el archivo de entrada: {pdf_path}")
            failed += 1
        except wht_errors.ExtractionError as e:
            log.error(f"{pdf_path}: {e}")
            failed += 1
        except Exception as e:
            log.error(f"Ocurrió un error inesperado con {pdf_path}: {e}", exc_info=True)
            failed += 1

    if args.csv and records:
        wht_exporters.records_to_csv(records, args.csv)
        log.info(f"CSV : {args.csv}")

    if failed:
        log.error(f"{failed} de {len(args.pdf_paths)} archivos fallaron.")
        sys.exit(1)
    log.info("✔ Proceso completado.")

if __name__ == "__main__":
    main()
