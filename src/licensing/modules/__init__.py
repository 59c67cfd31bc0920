"""📦 modules/: Bounded contexts específicos del negocio

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/         → Entidades, value objects, excepciones y puertos
   • application/    → Casos de uso
   • infrastructure/ → Adaptadores concretos (disco, XML, observabilidad)
   • entry_points/   → CLI

✨ Módulos actuales:
   • store/ → Almacén de licencias (archivo único o directorio de .license)
"""
