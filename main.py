import sys
import os

# Adiciona o diretório atual ao path para garantir que imports 'platcalc' funcionem
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from platcalc.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
